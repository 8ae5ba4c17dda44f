"""HexaShop — Application use cases. Each one depends only on a repository port."""
