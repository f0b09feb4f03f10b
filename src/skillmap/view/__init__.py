"""
The VIEW layer: drawing the skill map and turning Qt events into map actions.
"""
