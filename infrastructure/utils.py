import secrets
import string


DOCUMENT_ID_ALPHABET = string.ascii_letters + string.digits
DOCUMENT_ID_LENGTH = 20


def generate_document_id() -> str:
    """
    Generates a random document id of 20 alphanumeric characters.

    The ids are random rather than derived from the document content, so two documents
    with equal data still get different ids and an id is never reused after deletion.

    :return: A string representing the generated id.
    """
    return ''.join(secrets.choice(DOCUMENT_ID_ALPHABET) for _ in range(DOCUMENT_ID_LENGTH))
