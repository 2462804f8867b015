"""
Dash UI adapters: app factory, layout builders and callbacks.
"""
