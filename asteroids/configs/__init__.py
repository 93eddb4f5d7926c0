"""Configuration modules"""
