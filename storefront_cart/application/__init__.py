"""
Application Layer

Contains the cart store use case and its request/response objects.
This layer orchestrates the flow of data between the cart entities and the
stock, catalog, storage and notification collaborators.
"""
