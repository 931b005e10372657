"""
Service layer abstraction.

Each service encapsulates the logic for one exercise.  API handlers
only translate between HTTP and the service calls.
"""
