from .tweet_routes import router as tweet_router

__all__ = ['tweet_router']
