"""Document analysis pipeline: OCR followed by three generation tasks.

The extracted text is fed into a summary prompt, a key-term prompt and a
risk-assessment prompt. The three prompts are independent of each other
and can optionally run on a small thread pool.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from typing import Protocol

from src.generation.gemini import GeminiGenerator
from src.ocr.document_ai import DocumentAIExtractor
from src.utils.config import AppConfig
from src.utils.credentials import build_credentials
from src.utils.logger import get_logger

from .prompts import AnalysisTask, render_prompt

logger = get_logger(__name__)


class NoExtractableTextError(ValueError):
    """Raised when OCR returns no usable text for a document."""

    def __init__(self) -> None:
        super().__init__("Document contained no extractable text.")


class TextExtractor(Protocol):
    def extract_text(self, content: bytes, mime_type: str) -> str: ...


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


@dataclass
class AnalysisResult:
    """Combined output of one document analysis."""

    text: str
    summary: str
    key_terms: str
    risk_assessment: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class DocumentAnalyzer:
    """Runs extraction and the three generation tasks for one document.

    Args:
        extractor: OCR backend returning plain text for raw bytes.
        generator: Text generation backend.
        parallel: Issue the generation prompts concurrently.
    """

    def __init__(
        self,
        extractor: TextExtractor,
        generator: TextGenerator,
        parallel: bool = False,
    ) -> None:
        self.extractor = extractor
        self.generator = generator
        self.parallel = parallel

    def analyze(self, content: bytes, mime_type: str) -> AnalysisResult:
        """Extract text from a document and run all analysis prompts.

        Args:
            content: Raw document bytes.
            mime_type: Declared MIME type of the document.

        Returns:
            Extracted text with summary, key terms, and risk assessment.

        Raises:
            NoExtractableTextError: If the extracted text is blank.
        """
        text = self.extractor.extract_text(content, mime_type)
        if not text.strip():
            raise NoExtractableTextError()

        outputs = self._run_tasks(text)
        return AnalysisResult(
            text=text,
            summary=outputs[AnalysisTask.SUMMARY],
            key_terms=outputs[AnalysisTask.KEY_TERMS],
            risk_assessment=outputs[AnalysisTask.RISK_ASSESSMENT],
        )

    def _run_tasks(self, text: str) -> dict[AnalysisTask, str]:
        prompts = {task: render_prompt(task, text) for task in AnalysisTask}

        if not self.parallel:
            outputs = {}
            for task, prompt in prompts.items():
                logger.info("Generating %s", task.value)
                outputs[task] = self.generator.generate(prompt)
            return outputs

        logger.info("Generating %d tasks concurrently", len(prompts))
        with ThreadPoolExecutor(max_workers=len(prompts)) as pool:
            futures = {
                task: pool.submit(self.generator.generate, prompt)
                for task, prompt in prompts.items()
            }
            return {task: future.result() for task, future in futures.items()}


def build_analyzer(config: AppConfig) -> DocumentAnalyzer:
    """Construct an analyzer wired to Document AI and Gemini.

    Args:
        config: Application configuration.
    """
    credentials = build_credentials(config.google)
    extractor = DocumentAIExtractor(config.google, credentials=credentials)
    generator = GeminiGenerator(
        config.generation,
        project_id=config.google.project_id,
        credentials=credentials,
    )
    return DocumentAnalyzer(extractor, generator, parallel=config.generation.parallel)
