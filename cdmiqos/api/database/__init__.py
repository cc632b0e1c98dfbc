"""Database layer backing externally stored status records."""
