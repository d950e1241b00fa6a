"""
FastAPI routers for all API endpoints.

- functions: POST /call/<FunctionName> for every callable function
- health: GET /health
"""
