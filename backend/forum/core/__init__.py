# forum/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Seed subjects and default admin creation
- db: Database configuration and connection management
- errors: Error taxonomy and exception handlers
- permissions: Ownership and admin checks for mutating actions
- security: Password hashing and session token signing
"""
