"""
Plan generation services.

Leaf-first: tag classifier, eligibility filter, candidate selector,
suggestion adapter (``services.llm``), plan packer, plan generator.
"""
