"""
handlers/ - Presentation Layer
================================
Console menu handlers. Each handler prompts the user, delegates to the
appropriate Service, and prints the response.
No business logic lives here.
"""
