"""Domain layer for authn"""
