"""Factory Method - documents decide which pages they are made of."""
from abc import ABC, abstractmethod
from typing import List

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


class Page:
    """Product: a page of a document."""

    @property
    def name(self) -> str:
        return self.__class__.__name__


class SkillsPage(Page):
    pass


class EducationPage(Page):
    pass


class ExperiencePage(Page):
    pass


class IntroductionPage(Page):
    pass


class ResultsPage(Page):
    pass


class ConclusionPage(Page):
    pass


class SummaryPage(Page):
    pass


class BibliographyPage(Page):
    pass


class Document(ABC):
    """Creator: the constructor calls the factory method."""

    def __init__(self):
        self.pages: List[Page] = []
        self.create_pages()

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def create_pages(self) -> None:
        """Factory method: populate ``self.pages``."""


class Resume(Document):
    def create_pages(self) -> None:
        self.pages.append(SkillsPage())
        self.pages.append(EducationPage())
        self.pages.append(ExperiencePage())


class Report(Document):
    def create_pages(self) -> None:
        self.pages.append(IntroductionPage())
        self.pages.append(ResultsPage())
        self.pages.append(ConclusionPage())
        self.pages.append(SummaryPage())
        self.pages.append(BibliographyPage())


@register_pattern
class FactoryMethodDemo(PatternDemo):
    info = PatternInfo(
        slug="factory-method",
        name="Factory Method",
        category=PatternCategory.CREATIONAL,
        intent=(
            "Define an interface for creating an object, but let subclasses decide "
            "which class to instantiate."
        ),
        participants=[
            Participant(role="Product", class_name="Page"),
            Participant(role="ConcreteProduct",
                        class_name="SkillsPage, EducationPage, ExperiencePage, IntroductionPage, "
                                   "ResultsPage, ConclusionPage, SummaryPage, BibliographyPage"),
            Participant(role="Creator", class_name="Document",
                        description="declares the factory method create_pages"),
            Participant(role="ConcreteCreator", class_name="Resume, Report"),
        ],
        applicability=[
            "a class can't anticipate the class of objects it must create",
            "a class wants its subclasses to specify the objects it creates",
        ],
    )

    def run(self) -> None:
        # Constructors call the factory method
        documents = [Resume(), Report()]
        for document in documents:
            self.emit(f"{document.name}:")
            for page in document.pages:
                self.emit(f" {page.name}")
            self.emit()
