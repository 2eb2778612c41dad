"""Text generation with a Vertex AI Gemini model.

Each prompt is sent as a single user turn with a fixed sampling
temperature and output cap; the first candidate's first text part is
returned.
"""

import vertexai
from google.auth.credentials import Credentials
from vertexai import generative_models

from src.utils.config import GenerationConfig
from src.utils.logger import get_logger

logger = get_logger(__name__)


def first_candidate_text(response: object) -> str | None:
    """Read ``candidates[0].content.parts[0].text`` from a model response.

    Returns:
        The generated text, or None if any step of the path is absent.
    """
    try:
        text = response.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError, ValueError):
        return None
    return text or None


class GeminiGenerator:
    """Prompt-to-completion wrapper around a Gemini ``GenerativeModel``.

    Args:
        config: Generation section of the application config.
        project_id: Google Cloud project hosting the model.
        credentials: Service-account credentials for the project.
        model: Optional pre-built model, mainly for tests.
    """

    def __init__(
        self,
        config: GenerationConfig,
        project_id: str | None = None,
        credentials: Credentials | None = None,
        model: generative_models.GenerativeModel | None = None,
    ) -> None:
        self.config = config
        if model is None:
            vertexai.init(
                project=project_id,
                location=config.location,
                credentials=credentials,
            )
            model = generative_models.GenerativeModel(config.model_name)
        self.model = model
        self.generation_config = generative_models.GenerationConfig(
            temperature=config.temperature,
            max_output_tokens=config.max_output_tokens,
        )

    def generate(self, prompt: str) -> str:
        """Generate a completion for a single prompt.

        Args:
            prompt: Fully rendered prompt text.

        Returns:
            Generated text, or the configured fallback text if the response
            carries no candidate text.
        """
        contents = [
            generative_models.Content(
                role="user", parts=[generative_models.Part.from_text(prompt)]
            )
        ]
        response = self.model.generate_content(
            contents, generation_config=self.generation_config
        )

        text = first_candidate_text(response)
        if text is None:
            logger.warning("Model response had no candidate text, using fallback")
            return self.config.fallback_text
        return text
