"""Text extraction through a Google Document AI processor.

Sends raw document bytes to a configured processor and returns the
plain text of the resulting document.
"""

from google.api_core.client_options import ClientOptions
from google.auth.credentials import Credentials
from google.cloud import documentai

from src.utils.config import GoogleCloudConfig
from src.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentAIExtractor:
    """Wrapper around the Document AI ``process_document`` call.

    Args:
        config: Google Cloud section of the application config.
        credentials: Service-account credentials for the project.
        client: Optional pre-built processor client, mainly for tests.
    """

    def __init__(
        self,
        config: GoogleCloudConfig,
        credentials: Credentials | None = None,
        client: documentai.DocumentProcessorServiceClient | None = None,
    ) -> None:
        if not config.project_id or not config.processor_id:
            raise ValueError("Document AI project and processor are not configured")
        self.config = config
        self.client = client or documentai.DocumentProcessorServiceClient(
            credentials=credentials,
            client_options=ClientOptions(
                api_endpoint=f"{config.location}-documentai.googleapis.com"
            ),
        )

    @property
    def processor_name(self) -> str:
        return self.config.processor_name

    def extract_text(self, content: bytes, mime_type: str) -> str:
        """Run OCR on a document and return its text.

        Args:
            content: Raw document bytes.
            mime_type: Declared MIME type of the document.

        Returns:
            Extracted text, or an empty string if the processor returned none.
        """
        request = documentai.ProcessRequest(
            name=self.processor_name,
            raw_document=documentai.RawDocument(content=content, mime_type=mime_type),
        )
        logger.info(
            "Sending %d bytes (%s) to processor %s",
            len(content),
            mime_type,
            self.processor_name,
        )
        result = self.client.process_document(request=request)

        document = getattr(result, "document", None)
        text = getattr(document, "text", None) or ""
        logger.info("Extracted %d characters", len(text))
        return text
