"""Tests for the Gemini text generator."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from src.generation.gemini import GeminiGenerator, first_candidate_text
from src.utils.config import GenerationConfig


def _response(text: str | None) -> SimpleNamespace:
    """Build an object shaped like a Gemini ``GenerationResponse``."""
    if text is None:
        return SimpleNamespace(candidates=[])
    part = SimpleNamespace(text=text)
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
    return SimpleNamespace(candidates=[candidate])


@pytest.fixture
def mock_model() -> MagicMock:
    model = MagicMock()
    model.generate_content.return_value = _response("The lease runs for two years.")
    return model


class TestFirstCandidateText:
    """Tests for reading text out of a model response."""

    def test_reads_first_part(self) -> None:
        assert first_candidate_text(_response("hello")) == "hello"

    def test_no_candidates(self) -> None:
        assert first_candidate_text(_response(None)) is None

    def test_no_parts(self) -> None:
        candidate = SimpleNamespace(content=SimpleNamespace(parts=[]))
        assert first_candidate_text(SimpleNamespace(candidates=[candidate])) is None

    def test_missing_content(self) -> None:
        candidate = SimpleNamespace()
        assert first_candidate_text(SimpleNamespace(candidates=[candidate])) is None

    def test_candidates_none(self) -> None:
        assert first_candidate_text(SimpleNamespace(candidates=None)) is None


class TestGeminiGenerator:
    """Tests for GeminiGenerator.generate."""

    def test_generate_returns_text(self, mock_model: MagicMock) -> None:
        generator = GeminiGenerator(GenerationConfig(), model=mock_model)
        assert generator.generate("Summarize") == "The lease runs for two years."

    def test_prompt_sent_as_user_turn(self, mock_model: MagicMock) -> None:
        generator = GeminiGenerator(GenerationConfig(), model=mock_model)
        generator.generate("Summarize this legal document:\n\nLease")

        contents = mock_model.generate_content.call_args.args[0]
        assert len(contents) == 1
        assert contents[0].role == "user"
        assert contents[0].parts[0].text == "Summarize this legal document:\n\nLease"

    def test_generation_config_passed(self, mock_model: MagicMock) -> None:
        generator = GeminiGenerator(GenerationConfig(), model=mock_model)
        generator.generate("prompt")

        kwargs = mock_model.generate_content.call_args.kwargs
        assert kwargs["generation_config"] is generator.generation_config

    @patch("src.generation.gemini.generative_models.GenerationConfig")
    def test_sampling_parameters(
        self, mock_gen_config: MagicMock, mock_model: MagicMock
    ) -> None:
        GeminiGenerator(GenerationConfig(), model=mock_model)
        mock_gen_config.assert_called_once_with(temperature=0.3, max_output_tokens=300)

    @pytest.mark.parametrize("text", [None, ""])
    def test_fallback_when_text_absent(
        self, mock_model: MagicMock, text: str | None
    ) -> None:
        mock_model.generate_content.return_value = _response(text)
        generator = GeminiGenerator(
            GenerationConfig(fallback_text="Unavailable"), model=mock_model
        )
        assert generator.generate("prompt") == "Unavailable"

    def test_model_errors_propagate(self, mock_model: MagicMock) -> None:
        mock_model.generate_content.side_effect = RuntimeError("permission denied")
        generator = GeminiGenerator(GenerationConfig(), model=mock_model)
        with pytest.raises(RuntimeError, match="permission denied"):
            generator.generate("prompt")

    @patch("src.generation.gemini.generative_models.GenerativeModel")
    @patch("src.generation.gemini.vertexai.init")
    def test_initializes_vertex(
        self, mock_init: MagicMock, mock_model_cls: MagicMock
    ) -> None:
        credentials = MagicMock()
        generator = GeminiGenerator(
            GenerationConfig(model_name="gemini-test", location="europe-west4"),
            project_id="legal-proj",
            credentials=credentials,
        )

        mock_init.assert_called_once_with(
            project="legal-proj", location="europe-west4", credentials=credentials
        )
        mock_model_cls.assert_called_once_with("gemini-test")
        assert generator.model is mock_model_cls.return_value
