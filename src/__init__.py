"""Legal Document Analysis API.

Extracts text from uploaded legal documents with Google Document AI and
uses a Vertex AI Gemini model to produce a summary, a list of key terms,
and a risk assessment.
"""
