"""
Service layer abstraction.

Each service encapsulates the business logic for a domain.  The face
store keeps everything in memory; the API handlers only translate HTTP
requests into store calls.
"""
