"""
Authentication Service API Package

Package Structure:
    - dependencies.py: Settings, provider and service dependencies
    - v1/: Version 1 API implementation
        - api.py: Router aggregation
        - endpoints/: API endpoint handlers
        - models/: Pydantic request/response models
"""
