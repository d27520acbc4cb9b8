"""
Tuinofferte: quote calculation engine for garden construction (aanleg)
and garden maintenance (onderhoud).

Scope data + reference tables in, priced quote lines and totals out.
"""
