"""
Unit tests for the Ok/Err result helpers.
"""

import pytest

from lsp_wire.core.errors import InvalidURIError
from lsp_wire.core.result import Err, Ok, capture
from lsp_wire.core.uri import DocumentURI


class TestResult:

    def test_ok(self):
        res = Ok(3)
        assert res.is_ok() and not res.is_err()
        assert res.unwrap() == 3

    def test_err_unwrap_reraises(self):
        error = InvalidURIError("bad", uri="x")
        res = Err(error)
        assert res.is_err() and not res.is_ok()
        with pytest.raises(InvalidURIError) as exc_info:
            res.unwrap()
        assert exc_info.value is error

    def test_capture_only_listed_errors(self):
        ok = capture(DocumentURI.from_url, "file:///a", InvalidURIError)
        err = capture(DocumentURI.from_url, "http://a", InvalidURIError)

        assert isinstance(ok, Ok)
        assert ok.value.unbox() == "/a"
        assert isinstance(err, Err)
        assert isinstance(err.error, InvalidURIError)

        with pytest.raises(InvalidURIError):
            capture(DocumentURI.from_url, "http://a", KeyError)

