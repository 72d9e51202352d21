from pageocr.ocr.factory import OcrClientFactory
from pageocr.ocr.ocr_client import OcrClient

__all__ = ["OcrClient", "OcrClientFactory"]
