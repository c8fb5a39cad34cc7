"""
GraphQL API for companies
"""
