"""Tests for OutputBuffer."""
import io

import pytest

from humm.view import OutputBuffer


def test_captures_until_scope_ends():
    sink = io.StringIO()

    with OutputBuffer(sink) as buffer:
        buffer.write('hello ')
        buffer.write('world')
        assert sink.getvalue() == ''
        assert buffer.get_contents() == 'hello world'

    assert sink.getvalue() == 'hello world'
    assert not buffer.active


def test_callback_filters_contents():
    sink = io.StringIO()

    with OutputBuffer(sink, str.upper) as buffer:
        buffer.write('quiet')

    assert sink.getvalue() == 'QUIET'


def test_flushes_when_block_raises():
    sink = io.StringIO()
    seen = []

    def callback(contents):
        seen.append(contents)
        return contents

    with pytest.raises(ValueError):
        with OutputBuffer(sink, callback) as buffer:
            buffer.write('partial')
            raise ValueError('boom')

    assert seen == ['partial']
    assert sink.getvalue() == 'partial'


def test_cannot_be_started_twice():
    buffer = OutputBuffer(io.StringIO())

    with buffer:
        with pytest.raises(RuntimeError):
            buffer.__enter__()


def test_write_outside_scope_fails():
    buffer = OutputBuffer(io.StringIO())

    with pytest.raises(RuntimeError):
        buffer.write('nope')


def test_end_flush_is_idempotent():
    sink = io.StringIO()
    buffer = OutputBuffer(sink)

    with buffer:
        buffer.write('once')
    buffer.end_flush()

    assert sink.getvalue() == 'once'
    assert buffer.get_contents() == ''
