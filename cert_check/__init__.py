"""TLS certificate validation test harness."""
