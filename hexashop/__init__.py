"""HexaShop — hexagonal FastAPI backend for posts, products and users."""
__version__ = "0.1.0"
