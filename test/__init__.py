from .test_hexcolor import TestHexColor
from .test_conversion import TestConversion
from .test_contrast import TestContrast
from .test_suggestion import TestSuggestion
from .test_matrix import TestMatrix
from .test_report import TestConfig, TestReport

__all__ = (
    'TestHexColor',
    'TestConversion',
    'TestContrast',
    'TestSuggestion',
    'TestMatrix',
    'TestConfig',
    'TestReport',
)
