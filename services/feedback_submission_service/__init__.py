"""Feedback Submission Service.

Saves feedback session responses submitted by an instructor on behalf of
another instructor (moderation) and returns the redirect for the edit page.
"""
