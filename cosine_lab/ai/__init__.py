"""AI bridge to an external language model.

Available bridges:
    - LLMVectorBridge: OpenAI-compatible chat model via LLMClient
"""

from cosine_lab.ai.base import GeneratedVectors, VectorBridge
from cosine_lab.ai.llm_bridge import LLMVectorBridge

__all__ = [
    "GeneratedVectors",
    "LLMVectorBridge",
    "VectorBridge",
]
