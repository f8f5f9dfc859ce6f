"""ストアフロントクライアント."""
