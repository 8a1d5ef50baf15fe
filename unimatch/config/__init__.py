from unimatch.config.settings import Config

__all__ = ["Config"]
