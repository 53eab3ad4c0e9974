"""
Job Creator API Stub

Stand-in implementation of the dataset job creator API. Clients submit a job
description, receive an identifier and poll for its status. No real work is
done: every job reports "Pending" for a fixed delay and "Complete" afterwards.

Layers:
    - api: FastAPI application, routers, middleware
    - application: Commands (create job) and Queries (job status)
    - domain: Shared exception hierarchy
    - infrastructure: In-memory pending job registry
    - shared: Configuration
"""

__version__ = "0.1.0"
