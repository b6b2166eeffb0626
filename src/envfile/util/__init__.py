from .dotenv import DotenvResult, load_dotenv

__all__ = ["DotenvResult", "load_dotenv"]
