"""
Tests for the ldbsv command line interface.
"""

import json
import logging
from unittest.mock import patch

import pytest

import ldbsv
from config import AppConfig
from models import ServiceDetailsError
from service_documents import service_document
from service_parser import parse_service_details


@pytest.fixture
def details():
    return parse_service_details(service_document())


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestArguments:
    """Tests for argument parsing."""

    def test_service_command(self):
        args = ldbsv.build_parser().parse_args(['service', '202406078712345', '-t', 'tok', '--json'])
        assert args.command == 'service'
        assert args.rid == '202406078712345'
        assert args.token == 'tok'
        assert args.json is True

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            ldbsv.build_parser().parse_args([])
        assert exc_info.value.code == 2


class TestMain:
    """Tests for the CLI entry point."""

    def test_prints_summary(self, details, capsys):
        with patch('ldbsv.TrainTools') as tools_class:
            tools_class.return_value.get_service_details.return_value = details
            exit_code = ldbsv.main(['service', '202406078712345', '-t', 'tok'])

        out = capsys.readouterr().out
        assert exit_code == 0
        tools_class.assert_called_once_with(ldb_token='tok')
        assert 'Service 202406078712345' in out
        assert 'Type Ordinary Passenger (OO)' in out
        assert 'Haymarket' in out
        # passing locations are not calling points
        assert 'Linlithgow' not in out

    def test_prints_json(self, details, capsys):
        with patch('ldbsv.TrainTools') as tools_class:
            tools_class.return_value.get_service_details.return_value = details
            exit_code = ldbsv.main(['service', '202406078712345', '--json'])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data['trainid'] == '1A23'

    def test_error(self, capsys):
        with patch('ldbsv.TrainTools') as tools_class:
            tools_class.return_value.get_service_details.return_value = ServiceDetailsError(
                error='MissingField', message="field 'rid' is missing", field='rid'
            )
            exit_code = ldbsv.main(['service', 'x'])

        assert exit_code == 1
        assert 'MissingField' in capsys.readouterr().err

    def test_warns_when_token_not_configured(self, caplog):
        config = AppConfig(_env_file=None, testing=True, ldb_token=None)
        with patch('ldbsv.get_config', return_value=config), patch('ldbsv.TrainTools') as tools_class:
            tools_class.return_value.get_service_details.return_value = ServiceDetailsError(
                error='Missing API key', message='LDB_TOKEN is not set in environment.'
            )
            with caplog.at_level(logging.WARNING, logger='ldbsv'):
                exit_code = ldbsv.main(['service', 'x'])

        assert exit_code == 1
        assert 'Missing required configuration: LDB_TOKEN' in caplog.text

    def test_no_warning_with_token_argument(self, details, caplog):
        config = AppConfig(_env_file=None, testing=True, ldb_token=None)
        with patch('ldbsv.get_config', return_value=config), patch('ldbsv.TrainTools') as tools_class:
            tools_class.return_value.get_service_details.return_value = details
            with caplog.at_level(logging.WARNING, logger='ldbsv'):
                ldbsv.main(['service', 'x', '-t', 'tok'])

        assert 'Missing required configuration' not in caplog.text


class TestSetupLogging:
    """Tests for logging setup."""

    def test_repeated_setup_does_not_stack_handlers(self):
        config = AppConfig(_env_file=None, testing=True)
        ldbsv.setup_logging(config)
        ldbsv.setup_logging(config)

        names = [handler.get_name() for handler in logging.getLogger().handlers]
        assert names.count('ldbsv.console') == 1
        assert 'ldbsv.file' not in names

    def test_file_handler_outside_testing(self, tmp_path):
        config = AppConfig(_env_file=None, testing=False, log_file=str(tmp_path / 'logs' / 'ldbsv.log'))
        ldbsv.setup_logging(config)
        ldbsv.setup_logging(config)

        handlers = [h for h in logging.getLogger().handlers if h.get_name() == 'ldbsv.file']
        assert len(handlers) == 1
        assert (tmp_path / 'logs').is_dir()
        handlers[0].close()


class TestFormatting:
    """Tests for the text summary."""

    def test_lateness_and_cancellation(self, details):
        text = ldbsv.format_service_details(details)
        lines = text.splitlines()
        haymarket = next(line for line in lines if 'Haymarket' in line)
        edinburgh = next(line for line in lines if 'Edinburgh' in line)
        assert haymarket.startswith('17:35')
        assert '2 min late' in haymarket
        assert 'Plat 2' in haymarket
        assert 'On time' in edinburgh

    def test_hidden_platform(self, details):
        text = ldbsv.format_service_details(details)
        glasgow = next(line for line in text.splitlines() if 'Glasgow' in line)
        assert 'Plat' not in glasgow
        assert '10 min late' in glasgow
