MISSING_FIELDS_MSG = '''Missing required fields: {fields}'''
INVALID_FIELDS_MSG = '''Invalid fields: {fields}'''
INVALID_JSON_MSG = '''Request body must be a JSON object'''
INTERNAL_ERROR_MSG = '''Internal server error'''
