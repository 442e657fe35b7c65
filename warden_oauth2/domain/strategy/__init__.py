"""Strategy domain: OAuth2 strategy types, registration and binding."""
