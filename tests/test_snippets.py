"""
Tests for snippet building - author lines, dates and record mapping.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from reviewed_preprints.application.snippets import author_line, normalize_date, to_snippet
from reviewed_preprints.core.exceptions import InvalidTimestampError, MissingFieldError, ParseError
from reviewed_preprints.domain.entities import Author, EnhancedArticle, Subject


def _author(given: str, family: str) -> Author:
    return Author(given_names=[given], family_names=[family])


A = _author("Ann", "Able")
B = _author("Bob", "Baker")
C = _author("Cat", "Cole")
D = _author("Dan", "Dunn")
E = _author("Eve", "Evans")


# =============================================================================
# Author line
# =============================================================================


class TestAuthorLine:
    """Tests for author_line."""

    def test_no_authors(self):
        assert author_line([]) is None

    def test_single_author(self):
        jane = Author.from_dict({"givenNames": ["Jane"], "familyNames": ["Doe"]})
        assert author_line([jane]) == "Jane Doe"

    def test_two_authors(self):
        assert author_line([A, B]) == "Ann Able, Bob Baker"

    def test_three_authors(self):
        assert author_line([A, B, C]) == "Ann Able, Bob Baker, Cat Cole"

    def test_four_authors_skip_third(self):
        assert author_line([A, B, C, D]) == "Ann Able, Bob Baker ... Dan Dunn"

    def test_five_authors_use_last(self):
        assert author_line([A, B, C, D, E]) == "Ann Able, Bob Baker ... Eve Evans"

    def test_multiple_name_parts(self):
        author = Author(given_names=["Mary", "Jane"], family_names=["van", "Dyke"])
        assert author_line([author]) == "Mary Jane van Dyke"

    def test_no_family_names(self):
        assert author_line([Author(given_names=["Plato"])]) == "Plato"

    def test_no_given_names(self):
        # given names are empty, family names still separated by a space
        assert author_line([Author(family_names=["Consortium"])]) == " Consortium"


# =============================================================================
# Dates
# =============================================================================


class TestNormalizeDate:
    """Tests for normalize_date."""

    def test_datetime_drops_fraction(self):
        value = datetime(2023, 5, 1, 12, 30, 45, 678000, tzinfo=timezone.utc)
        assert normalize_date(value) == "2023-05-01T12:30:45Z"

    def test_iso_string_with_z(self):
        assert normalize_date("2023-05-01T12:30:45.678Z") == "2023-05-01T12:30:45Z"

    def test_offset_converted_to_utc(self):
        assert normalize_date("2023-05-01T14:30:45+02:00") == "2023-05-01T12:30:45Z"

    def test_offset_crossing_midnight(self):
        value = datetime(2023, 5, 1, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        assert normalize_date(value) == "2023-04-30T22:00:00Z"

    def test_naive_is_utc(self):
        assert normalize_date(datetime(2023, 5, 1, 12, 30, 45)) == "2023-05-01T12:30:45Z"

    def test_date_only_string(self):
        assert normalize_date("2023-05-01") == "2023-05-01T00:00:00Z"

    @pytest.mark.parametrize("value", [None, "", "yesterday", "2023-13-01T00:00:00Z", 12345])
    def test_invalid(self, value):
        with pytest.raises(InvalidTimestampError):
            normalize_date(value)


# =============================================================================
# Records
# =============================================================================


class TestEnhancedArticle:
    """Tests for EnhancedArticle.from_dict."""

    def test_from_dict(self, article_data):
        article = EnhancedArticle.from_dict(article_data)
        assert article.msid == "80494"
        assert article.preprint_doi == "10.1101/2022.06.24.497502"
        assert article.version_doi == "10.7554/eLife.80494.1"
        assert article.e_location_id == "RP80494"
        assert article.subjects == ["Cell Biology", "Neuroscience"]
        assert len(article.article.authors) == 2
        assert article.article.authors[1].given_names == ["John", "Q"]
        assert article.article.licenses == [{"type": "CC-BY"}]

    def test_missing_optional_blocks(self):
        article = EnhancedArticle.from_dict({"msid": "1"})
        assert article.subjects is None
        assert article.article.authors == []
        assert article.article.title is None

    def test_not_an_object(self):
        with pytest.raises(ParseError):
            EnhancedArticle.from_dict(["not", "a", "record"])

    @pytest.mark.parametrize(
        "overrides",
        [
            {"article": ["x"]},
            {"subjects": 5},
            {"relatedContent": "x"},
            {"article": {"authors": 5}},
            {"article": {"authors": [{"givenNames": 7}]}},
        ],
    )
    def test_malformed_blocks(self, make_article_data, overrides):
        with pytest.raises(ParseError) as exc_info:
            EnhancedArticle.from_dict(make_article_data(**overrides))
        assert str(exc_info.value).startswith("Parse error (preprints)")


class TestToSnippet:
    """Tests for to_snippet."""

    def test_maps_all_fields(self, article_data):
        snippet = to_snippet(EnhancedArticle.from_dict(article_data))

        assert snippet.id == "80494"
        assert snippet.doi == "10.1101/2022.06.24.497502"
        assert snippet.pdf == "https://example.org/80494.pdf"
        assert snippet.status == "reviewed"
        assert snippet.stage == "published"
        assert snippet.author_line == "Jane Doe, John Q Public"
        assert snippet.title == "Mapping <em>Drosophila</em> wing discs"
        assert snippet.published == "2023-05-01T12:30:45Z"
        assert snippet.reviewed_date == "2023-05-01T12:30:45Z"
        assert snippet.version_date == "2023-05-02T09:00:00Z"
        assert snippet.status_date == "2023-05-02T09:00:00Z"
        assert snippet.subjects == [
            Subject(id="cell-biology", name="Cell Biology"),
            Subject(id="neuroscience", name="Neuroscience"),
        ]

    def test_to_dict_shape(self, article_data):
        data = to_snippet(EnhancedArticle.from_dict(article_data)).to_dict()
        assert data == {
            "id": "80494",
            "doi": "10.1101/2022.06.24.497502",
            "pdf": "https://example.org/80494.pdf",
            "status": "reviewed",
            "authorLine": "Jane Doe, John Q Public",
            "title": "Mapping <em>Drosophila</em> wing discs",
            "published": "2023-05-01T12:30:45Z",
            "reviewedDate": "2023-05-01T12:30:45Z",
            "versionDate": "2023-05-02T09:00:00Z",
            "statusDate": "2023-05-02T09:00:00Z",
            "stage": "published",
            "subjects": [
                {"id": "cell-biology", "name": "Cell Biology"},
                {"id": "neuroscience", "name": "Neuroscience"},
            ],
        }

    def test_no_authors_omits_author_line(self, make_article_data):
        data = make_article_data(article={"title": "T"})
        result = to_snippet(EnhancedArticle.from_dict(data)).to_dict()
        assert "authorLine" not in result
        assert result["title"] == "T"

    def test_no_pdf_omits_pdf(self, make_article_data):
        data = make_article_data()
        del data["pdfUrl"]
        assert "pdf" not in to_snippet(EnhancedArticle.from_dict(data)).to_dict()

    def test_no_subjects_gives_empty_list(self, make_article_data):
        data = make_article_data()
        del data["subjects"]
        assert to_snippet(EnhancedArticle.from_dict(data)).to_dict()["subjects"] == []

    def test_unknown_subject_kept_without_id(self, make_article_data):
        data = make_article_data(subjects=["Ecology", "Astrophysics"])
        result = to_snippet(EnhancedArticle.from_dict(data)).to_dict()
        assert result["subjects"] == [{"id": "ecology", "name": "Ecology"}, {"name": "Astrophysics"}]

    def test_null_published_is_an_error(self, make_article_data):
        data = make_article_data(published=None)
        with pytest.raises(MissingFieldError) as exc_info:
            to_snippet(EnhancedArticle.from_dict(data))
        assert exc_info.value.field_name == "published"
        assert exc_info.value.record_id == "80494v1"

    @pytest.mark.parametrize("field_name", ["msid", "preprintDoi", "firstPublished"])
    def test_required_fields(self, make_article_data, field_name):
        data = make_article_data()
        del data[field_name]
        with pytest.raises(MissingFieldError) as exc_info:
            to_snippet(EnhancedArticle.from_dict(data))
        assert exc_info.value.field_name == field_name

    def test_invalid_timestamp(self, make_article_data):
        data = make_article_data(firstPublished="not a date")
        with pytest.raises(InvalidTimestampError):
            to_snippet(EnhancedArticle.from_dict(data))
