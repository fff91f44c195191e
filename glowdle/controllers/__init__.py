"""
Controllers Package

HTTP blueprints for puzzles and game sessions.
"""
