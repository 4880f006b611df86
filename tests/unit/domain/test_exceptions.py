"""Tests for domain/exceptions.py."""

import pytest

from specterm.domain.exceptions import (
    OutputStreamError,
    SpecTermError,
    StyleSpecError,
    WriterClosedError,
)


class TestSpecTermError:
    """Tests for the exception hierarchy."""

    def test_is_exception(self) -> None:
        assert issubclass(SpecTermError, Exception)

    def test_style_spec_error(self) -> None:
        err = StyleSpecError(spec="b;purple", token="purple")
        assert isinstance(err, SpecTermError)
        assert isinstance(err, ValueError)
        assert err.spec == "b;purple"
        assert err.token == "purple"
        assert "purple" in str(err)

    def test_output_stream_error_is_os_error(self) -> None:
        with pytest.raises(OSError):
            raise OutputStreamError("disk full")

    def test_writer_closed_error(self) -> None:
        err = WriterClosedError()
        assert isinstance(err, RuntimeError)
        assert str(err) == "writer is closed"
