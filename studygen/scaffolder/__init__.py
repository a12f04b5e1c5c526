"""studygen scaffolder -- renders C++ study headers and stubs.

Quick usage::

    from studygen.parser import load_study
    from studygen.scaffolder import StudyGenerator

    study = load_study("studies/TestStudy.json")
    result = StudyGenerator(study).generate("studies/TestStudy.json")
    # studies/TestStudy.h is always rewritten,
    # studies/TestStudy.cpp only if it did not exist.
"""

from studygen.scaffolder.generator import GenerationResult, StudyGenerator
from studygen.scaffolder.header_gen import HeaderGenerator
from studygen.scaffolder.stub_gen import StubGenerator
from studygen.scaffolder.templates import TemplateRenderer

__all__ = [
    "GenerationResult",
    "HeaderGenerator",
    "StubGenerator",
    "StudyGenerator",
    "TemplateRenderer",
]
