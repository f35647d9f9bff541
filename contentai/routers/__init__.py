"""
Routers module - API endpoint handlers organized by feature.

Each router handles a specific domain of the API:
- content: Content tools (generate, rewrite, summarize, translate), catalogs,
  provider status and credentials
- voice: Voice/text command interpretation and execution
"""
