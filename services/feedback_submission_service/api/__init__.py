"""API package for Feedback Submission Service."""
