"""Request rate limiting."""

from .limiter import RateLimitDecision, RateLimiter

__all__ = ["RateLimitDecision", "RateLimiter"]
