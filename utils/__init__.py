"""
Utility modules for the nightly release pruner
"""

from .network import GitHubAPIError, api_request, create_session

__all__ = ['GitHubAPIError', 'api_request', 'create_session']
