from dataclasses import dataclass


@dataclass(frozen=True)
class ModelInfo:
    id: str
    name: str
    provider: str


HF_API_URL = "https://router.huggingface.co/v1/chat/completions"

DEFAULT_MODEL = ModelInfo("moonshotai/Kimi-K2-Thinking:novita", "Kimi K2 Thinking", "Moonshot AI")

# Sampling parameters sent with every completion request
MAX_TOKENS = 512
TEMPERATURE = 0.7
TOP_P = 0.95
