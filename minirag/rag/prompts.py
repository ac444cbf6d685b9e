"""Answer templates."""

ANSWER_TEMPLATE = (
    'Based on the retrieved documents, here\'s an answer to "$query": '
    "The query is related to $context. "
    "This information suggests that RAG systems are crucial for improving AI "
    "responses by leveraging efficient retrieval methods and large language models."
)


def build_answer(query: str, context: str) -> str:
    """Fill the answer template.

    Query and context are inserted verbatim, query first. Placeholders are
    substituted positionally, so "$" or "{" inside the inputs are left alone.

    Args:
        query: User query text
        context: Joined text of the retrieved chunks

    Returns:
        Answer string
    """
    head, rest = ANSWER_TEMPLATE.split("$query", 1)
    middle, tail = rest.split("$context", 1)
    return f"{head}{query}{middle}{context}{tail}"
