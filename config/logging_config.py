import logging
import logging.config
from config.main_config import LOG_FILE, LOG_LEVEL


class ClientFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'client'):
            record.client = 'SYSTEM'  # Set default client if not provided
        return True
    

logging_config = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(client)s - %(message)s'
        },
    },
    'filters': {
        'client_filter': {
            '()': ClientFilter,
        },
    },
    'handlers': {
        'file': {
            'level': LOG_LEVEL,
            'class': 'logging.FileHandler',
            'filename': LOG_FILE,
            'formatter': 'standard',
            'filters': ['client_filter']
        },
        'console': {
            'level': LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['client_filter']
        },
    },
    'loggers': {
        'handlers': {  
            'handlers': ['file', 'console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'use_cases': {  
            'handlers': ['file', 'console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'repositories': {  
            'handlers': ['file', 'console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'storage': { 
            'handlers': ['file', 'console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        '': {  
            'handlers': ['file', 'console'],
            'level': LOG_LEVEL,
            'propagate': True,
        }
    }
}

logging.config.dictConfig(logging_config)
