"""
Domain Layer

Contains the cart entities, value objects and the abstract collaborators
(stock, catalog, storage, notifications) the application layer depends on.
"""
