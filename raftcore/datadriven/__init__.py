"""A runner for data-driven test files: directive parsing, expectation checks and rewriting."""