"""Application layer - DI container and declarative provider setup."""
