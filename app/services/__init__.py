"""
Request pipelines used by the API routes.
"""
