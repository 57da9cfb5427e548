"""
Routers - URL and form binding for the controllers.
"""
