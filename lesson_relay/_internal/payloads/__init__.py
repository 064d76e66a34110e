"""Wire-format editing for captured request bodies.

Modules:
    fluency - Fluency Builder JSON time payloads
    foundations - Foundations XML time and course-score payloads
"""
