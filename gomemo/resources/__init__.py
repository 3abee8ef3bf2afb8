"""Built-in resources shipped with go-memo."""
