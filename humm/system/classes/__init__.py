"""
System view classes
Fallback classes for views, used when no site provides one
"""
