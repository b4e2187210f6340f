"""Pydantic models for tasks, user statistics and achievements"""
