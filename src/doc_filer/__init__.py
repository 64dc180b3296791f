"""doc-filer -- Naive Bayes filing of documents into directory categories."""

__version__ = "0.1.0"

from .classifier import (
    classify,
    log_likelihood,
    precise_exp,
    raw_scores,
    relative_scores,
    score_frequencies,
    select_best,
    truncate,
)
from .corpus import discover, list_categories, list_documents, true_category_of
from .errors import ConfigError, ExtractionError, FilerError, InvalidModelError
from .evaluator import evaluate, summarize_category, test_all, test_category, test_document
from .extraction import extract_text, get_parser
from .frequencies import category_frequencies, document_frequencies, sum_frequencies
from .models import (
    UNTRAINED,
    Category,
    CategoryReport,
    DocumentRef,
    DocumentResult,
    EvaluationReport,
    Trained,
    TrainingResult,
    Untrained,
)
from .probability import probability
from .tokenizer import tokenize
from .trainer import make_category, partition, train, train_category, train_directory

__all__ = [
    # Models
    "Category",
    "CategoryReport",
    "DocumentRef",
    "DocumentResult",
    "EvaluationReport",
    "Trained",
    "TrainingResult",
    "UNTRAINED",
    "Untrained",
    # Errors
    "ConfigError",
    "ExtractionError",
    "FilerError",
    "InvalidModelError",
    # Corpus and extraction
    "discover",
    "extract_text",
    "get_parser",
    "list_categories",
    "list_documents",
    "true_category_of",
    # Frequency model
    "tokenize",
    "document_frequencies",
    "sum_frequencies",
    "category_frequencies",
    "probability",
    # Classification
    "classify",
    "log_likelihood",
    "precise_exp",
    "raw_scores",
    "relative_scores",
    "score_frequencies",
    "select_best",
    "truncate",
    # Training and evaluation
    "partition",
    "make_category",
    "train_category",
    "train",
    "train_directory",
    "test_document",
    "test_category",
    "summarize_category",
    "test_all",
    "evaluate",
]
