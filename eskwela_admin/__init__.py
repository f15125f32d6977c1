"""
E-Skwela AR admin mock API.

In-memory stand-in for the admin backend: users, AR content, quizzes,
questions, quiz attempts and analytics behind an async envelope contract.
"""
__version__ = "1.0.0"
