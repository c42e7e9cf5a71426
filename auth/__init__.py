"""
auth: user authentication module.

Provides:
  • Signed token issuing & verification (``TokenService``)
  • Password hashing (bcrypt with a stored salt)
  • Signup / signin API routes
  • ``get_current_user`` FastAPI dependency
"""
