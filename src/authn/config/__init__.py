"""Configuration for authn"""
