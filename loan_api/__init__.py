"""
Loan API - Borrower Registration, Borrowing Capacity & Loan Assessment Service

A FastAPI-based microservice that registers borrowers, estimates how much
they could borrow, and renders APPROVED / REJECTED / REVIEW decisions on
loan applications.
"""

__version__ = "1.0.0"
