from .errors import ProblemDetails
from .graph import ConvertRequest, GraphResponse, InferRequest, InferResponse, LowerRequest

__all__ = [
    "ProblemDetails",
    "ConvertRequest",
    "GraphResponse",
    "InferRequest",
    "InferResponse",
    "LowerRequest",
]
