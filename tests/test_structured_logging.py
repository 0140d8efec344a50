import json

import pytest

from bugsuite.logging import StructuredLogger, configure_logging, get_logger


def test_structured_logger_json_format(capsys):
    """Structured logger produces JSON output when configured."""
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.log_operation('test_operation', param1='value1', param2=42)

    captured = capsys.readouterr()
    log_lines = [line for line in captured.out.strip().split('\n') if line]

    assert len(log_lines) == 1
    log_data = json.loads(log_lines[0])

    assert log_data['level'] == 'INFO'
    assert log_data['operation'] == 'test_operation'
    assert log_data['param1'] == 'value1'
    assert log_data['param2'] == 42
    assert 'timestamp' in log_data


def test_structured_logger_regular_format(capsys):
    """Structured logger produces plain text output when JSON is disabled."""
    logger = StructuredLogger(name='test', json_logging=False, level='INFO')
    logger.log_operation('test_operation', param1='value1')

    captured = capsys.readouterr()
    assert 'Operation: test_operation' in captured.out
    assert 'test' in captured.out
    assert 'INFO' in captured.out


def test_structured_logger_record_action(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='DEBUG')
    logger.log_record('parsed', 'Bug via JSON', state='open')

    log_data = json.loads(capsys.readouterr().out.strip())

    assert log_data['operation'] == 'bug_parsed'
    assert log_data['comment'] == 'Bug via JSON'
    assert log_data['state'] == 'open'
    assert log_data['level'] == 'DEBUG'


def test_record_action_hidden_at_info(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.log_record('parsed', 'quiet')
    assert capsys.readouterr().out == ''


def test_json_mode_dedupes_consecutive_entries(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.log_operation('repeat', n=1)
    logger.log_operation('repeat', n=1)
    logger.log_operation('repeat', n=2)

    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert [json.loads(line)['n'] for line in lines] == [1, 2]


def test_structured_logger_performance_timing(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.log_performance('find', 1234.56, match_count=10)

    log_data = json.loads(capsys.readouterr().out.strip())

    assert log_data['operation'] == 'find'
    assert log_data['duration_ms'] == 1234.56
    assert log_data['match_count'] == 10


def test_timed_operation_context_manager(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')

    with logger.timed_operation('load', source='bugs.txt'):
        pass

    log_lines = [line for line in capsys.readouterr().out.strip().split('\n') if line]
    assert len(log_lines) >= 2

    start_log = json.loads(log_lines[0])
    assert start_log['operation'] == 'load_start'
    assert start_log['source'] == 'bugs.txt'

    perf_log = json.loads(log_lines[1])
    assert perf_log['operation'] == 'load'
    assert 'duration_ms' in perf_log


def test_timed_operation_logs_and_reraises(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')

    with pytest.raises(RuntimeError):
        with logger.timed_operation('load'):
            raise RuntimeError('boom')

    entries = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]
    assert entries[-1]['level'] == 'ERROR'
    assert entries[-1]['error'] == 'boom'


def test_configure_logging():
    logger1 = configure_logging(json_logging=True, level='DEBUG')
    logger2 = configure_logging(json_logging=False, level='INFO')

    assert logger1 != logger2
    assert get_logger() is logger2


def test_log_error_carries_error_and_extras(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.log_error('record parse failed', error='Timestamp is not numeric', category='parse')

    log_data = json.loads(capsys.readouterr().out.strip())

    assert log_data['level'] == 'ERROR'
    assert log_data['message'] == 'record parse failed'
    assert log_data['error'] == 'Timestamp is not numeric'
    assert log_data['category'] == 'parse'


def test_error_passes_extras(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.error('source unreadable', source='bugs.txt')

    log_data = json.loads(capsys.readouterr().out.strip())

    assert log_data['level'] == 'ERROR'
    assert 'error' not in log_data
    assert log_data['source'] == 'bugs.txt'
