"""Domain models and errors.

These types describe *what* travels through the pipeline (options, validated
URL, request, response), not *how* it is sent.
"""
