from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement
from sqlalchemy.types import Integer


class strpos(FunctionElement):
    """
    1-based position of ``needle`` in ``haystack``, 0 when absent.

    Always a case-sensitive comparison, unlike LIKE on SQLite.
    """
    type = Integer()
    name = "strpos"
    inherit_cache = True


@compiles(strpos)
def _strpos_default(element, compiler, **kw):
    return "strpos(%s)" % compiler.process(element.clauses, **kw)


@compiles(strpos, "sqlite")
def _strpos_sqlite(element, compiler, **kw):
    return "instr(%s)" % compiler.process(element.clauses, **kw)


def contains_case_sensitive(haystack, needle: str):
    return strpos(haystack, needle) > 0
