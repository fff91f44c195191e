"""
Game Logger Module for the Glowdle Server

This module provides structured logging for user actions, server responses,
game events and failures of the external word services.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the Glowdle server.
    
    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging (wins, losses, daily puzzle selection)
    - JSON structured logs for easy parsing
    """
    
    def __init__(self, log_dir: str = Config.LOG_DIR, level: str = Config.LOG_LEVEL):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO
        
        # Setup main game logger
        self.logger = self._setup_logger()
        
    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
    
    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('glowdle')
        logger.setLevel(self.level)
        
        # Prevent duplicate handlers; close the old ones so their files are released
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        
        # File handler for detailed logs
        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        
        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        
        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )
        
        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)
        
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        
        return logger
    
    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Extract user identity information from request."""
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
        }
    
    def _create_log_entry(self, 
                         event_type: str, 
                         action: str, 
                         user_info: Dict[str, Optional[str]],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)
    
    def log_user_action(self, 
                       request, 
                       action: str, 
                       game_id: Optional[str] = None,
                       **kwargs):
        """
        Log user actions with full context.
        
        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'create_puzzle')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }
        
        log_message = self._create_log_entry('USER_ACTION', action, self._get_user_identity(request), details)
        self.logger.info(log_message)
    
    def log_server_response(self, 
                           request, 
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           game_id: Optional[str] = None,
                           **kwargs):
        """
        Log server responses with full context.
        
        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, self._get_user_identity(request), details)
        
        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)
    
    def log_game_event(self, 
                      game_id: Optional[str],
                      event: str,
                      user_ip: str,
                      **kwargs):
        """
        Log game-specific events (wins, losses, daily word selection).
        
        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'daily_word_selected')
            user_ip: User's IP address, or 'system' for server-initiated events
            **kwargs: Additional game details
        """
        details = {
            'game_id': game_id,
            **kwargs
        }
        
        log_message = self._create_log_entry('GAME_EVENT', event, {'user_ip': user_ip}, details)
        self.logger.info(log_message)
    
    def log_error(self, 
                 request, 
                 error: Exception,
                 action: str,
                 game_id: Optional[str] = None):
        """
        Log errors with full context.
        
        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        
        log_message = self._create_log_entry('ERROR', action, self._get_user_identity(request), details)
        self.logger.error(log_message)
    
    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep puzzle answers and full share links out of the logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}
        
        sanitized = data.copy()
        
        for secret_field in ('token', 'link', 'share_text'):
            if secret_field in sanitized:
                sanitized[secret_field] = '<redacted>'
        
        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'game_type': state.get('game_type'),
                'max_guesses': state.get('max_guesses'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }
        
        return sanitized
    
    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        try:
            log_file = self._log_file()
            if not log_file.exists():
                return {'error': 'No log file found for today'}
            
            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'errors': 0
            }
            
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
            
            return stats
            
        except Exception as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance
game_logger = GameLogger()
