"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives updates from Telegram,
delegates to the appropriate Service, and answers the user.
No navigation logic lives here.
"""
