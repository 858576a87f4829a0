"""Core helpers for authn"""
