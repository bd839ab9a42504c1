import pytest
from requests.structures import CaseInsensitiveDict

from cwmanage import ParseError
from cwmanage.pagination import extract_page_id, next_page_id

from conftest import next_link


class TestExtractPageId:
    def test_reads_page_id(self):
        assert extract_page_id(next_link(2)) == "2"

    def test_opaque_token(self):
        link = '<https://h/c/apis/v/p?pageSize=25&pageId=Mzk5OQ%3D%3D>; rel="next"'
        assert extract_page_id(link) == "Mzk5OQ=="

    def test_no_page_id(self):
        link = '<https://h/c/apis/v/p?pageSize=25>; rel="next"'
        assert extract_page_id(link) is None

    def test_parameter_name_is_case_sensitive(self):
        link = '<https://h/c/apis/v/p?pageid=4>; rel="next"'
        assert extract_page_id(link) is None

    def test_only_first_link_entry(self):
        link = '<https://h/c/apis/v/p?pageId=3>; rel="next" link = <https://h/c/apis/v/p?pageId=9>'
        assert extract_page_id(link) == "3"

    def test_malformed_header(self):
        with pytest.raises(ParseError):
            extract_page_id("https://h/c/apis/v/p?pageId=3")


class TestNextPageId:
    def test_missing_header(self):
        assert next_page_id(CaseInsensitiveDict()) is None

    def test_empty_header(self):
        assert next_page_id(CaseInsensitiveDict({"link": ""})) is None

    def test_header_name_case_insensitive(self):
        headers = CaseInsensitiveDict({"Link": next_link(7)})
        assert next_page_id(headers) == "7"

    def test_whitespace_is_not_empty(self):
        with pytest.raises(ParseError):
            next_page_id(CaseInsensitiveDict({"link": "  "}))
