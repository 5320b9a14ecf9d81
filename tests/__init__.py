"""
Mastermind TV Test Suite

Test Categories:
- unit/: Fast, isolated unit tests
- integration/: HTTP tests against the FastAPI application
- fixtures/: Shared test data and fakes
"""
