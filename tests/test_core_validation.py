"""
Tests for configuration validation utilities.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from allsongs.core.validation import check_dependencies, validate_configuration, validate_and_raise
from allsongs.core.exceptions import ConfigurationError


class TestCheckDependencies:
    """Tests for check_dependencies function."""
    
    @patch('importlib.import_module')
    def test_all_installed(self, mock_import):
        """Test all installed."""
        mock_import.return_value = MagicMock()
        
        all_installed, missing = check_dependencies()
        
        assert all_installed is True
        assert missing == []
    
    @patch('importlib.import_module')
    def test_missing_module(self, mock_import):
        """Test missing module."""
        def side_effect(module_name):
            if module_name == "rich":
                raise ImportError("No module named 'rich'")
            return MagicMock()
        mock_import.side_effect = side_effect
        
        all_installed, missing = check_dependencies()
        
        assert all_installed is False
        assert missing == ["rich"]


class TestValidateConfiguration:
    """Tests for validate_configuration and validate_and_raise."""
    
    def test_default_configuration_is_valid(self):
        """Test default configuration is valid."""
        is_valid, errors = validate_configuration()
        
        assert is_valid, errors
    
    def test_negative_delay_is_invalid(self):
        """Test negative delay is invalid."""
        with patch.dict('allsongs.core.validation.SPOTIFY_CONFIG', {"REQUEST_DELAY": -1}):
            is_valid, errors = validate_configuration()
        
        assert not is_valid
        assert any("REQUEST_DELAY" in e for e in errors)
    
    def test_non_numeric_delay_is_invalid(self):
        """Test an unparseable request delay is reported, not raised."""
        with patch.dict('allsongs.core.validation.SPOTIFY_CONFIG', {"REQUEST_DELAY": None}):
            is_valid, errors = validate_configuration()
        
        assert not is_valid
        assert any("ALLSONGS_REQUEST_DELAY" in e for e in errors)
    
    def test_oversized_chunk_is_invalid(self):
        """Test oversized chunk is invalid."""
        with patch.dict('allsongs.core.validation.SPOTIFY_CONFIG', {"PLAYLIST_CHUNK_SIZE": 101}):
            is_valid, errors = validate_configuration()
        
        assert not is_valid
        assert any("PLAYLIST_CHUNK_SIZE" in e for e in errors)
    
    def test_bad_log_level(self):
        """Test bad log level."""
        with patch.dict('allsongs.core.validation.LOGGING_CONFIG', {"LEVEL": "LOUD"}):
            with pytest.raises(ConfigurationError):
                validate_and_raise()
