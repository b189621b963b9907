"""Connection mechanisms and the suites built on them."""
