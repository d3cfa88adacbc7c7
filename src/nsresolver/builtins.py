"""Classes, interfaces and exceptions PHP declares in the global namespace."""

from __future__ import annotations

BUILTIN_CLASSES: frozenset[str] = frozenset({
    # Core
    "stdClass", "Closure", "Generator", "WeakReference", "WeakMap", "Fiber",
    "Attribute", "ReturnTypeWillChange", "AllowDynamicProperties",
    "SensitiveParameter", "SensitiveParameterValue", "Override",
    "__PHP_Incomplete_Class", "php_user_filter", "Directory",
    # Core interfaces
    "Traversable", "Iterator", "IteratorAggregate", "ArrayAccess",
    "Serializable", "Countable", "Stringable", "JsonSerializable", "UnitEnum",
    "BackedEnum",
    # Errors and exceptions
    "Throwable", "Exception", "ErrorException", "Error", "CompileError",
    "ParseError", "TypeError", "ArgumentCountError", "ValueError",
    "ArithmeticError", "DivisionByZeroError", "UnhandledMatchError",
    "FiberError", "JsonException",
    # SPL exceptions
    "LogicException", "BadFunctionCallException", "BadMethodCallException",
    "DomainException", "InvalidArgumentException", "LengthException",
    "OutOfRangeException", "RuntimeException", "OutOfBoundsException",
    "OverflowException", "RangeException", "UnderflowException",
    "UnexpectedValueException",
    # SPL data structures
    "SplDoublyLinkedList", "SplQueue", "SplStack", "SplHeap", "SplMinHeap",
    "SplMaxHeap", "SplPriorityQueue", "SplFixedArray", "SplObjectStorage",
    "ArrayObject",
    # SPL iterators
    "ArrayIterator", "RecursiveArrayIterator", "AppendIterator",
    "CachingIterator", "CallbackFilterIterator", "DirectoryIterator",
    "EmptyIterator", "FilesystemIterator", "FilterIterator", "GlobIterator",
    "InfiniteIterator", "IteratorIterator", "LimitIterator", "MultipleIterator",
    "NoRewindIterator", "OuterIterator", "ParentIterator",
    "RecursiveCachingIterator", "RecursiveCallbackFilterIterator",
    "RecursiveDirectoryIterator", "RecursiveFilterIterator",
    "RecursiveIterator", "RecursiveIteratorIterator", "RecursiveRegexIterator",
    "RecursiveTreeIterator", "RegexIterator", "SeekableIterator",
    # SPL files and observers
    "SplFileInfo", "SplFileObject", "SplTempFileObject", "SplObserver",
    "SplSubject",
    # Date and time
    "DateTime", "DateTimeImmutable", "DateTimeInterface", "DateTimeZone",
    "DateInterval", "DatePeriod",
    # Reflection
    "Reflection", "ReflectionClass", "ReflectionClassConstant",
    "ReflectionEnum", "ReflectionEnumBackedCase", "ReflectionEnumUnitCase",
    "ReflectionException", "ReflectionExtension", "ReflectionFiber",
    "ReflectionFunction", "ReflectionFunctionAbstract", "ReflectionGenerator",
    "ReflectionIntersectionType", "ReflectionMethod", "ReflectionNamedType",
    "ReflectionObject", "ReflectionParameter", "ReflectionProperty",
    "ReflectionReference", "ReflectionType", "ReflectionUnionType",
    "ReflectionZendExtension", "ReflectionAttribute", "Reflector",
    # PDO
    "PDO", "PDOStatement", "PDOException", "PDORow",
    # DOM and XML
    "DOMDocument", "DOMElement", "DOMNode", "DOMNodeList", "DOMXPath",
    "DOMAttr", "DOMText", "DOMComment", "DOMException", "DOMImplementation",
    "DOMDocumentFragment", "DOMNamedNodeMap", "DOMCdataSection",
    "SimpleXMLElement", "SimpleXMLIterator", "XMLReader", "XMLWriter",
    "XSLTProcessor", "LibXMLError",
    # Intl
    "Collator", "NumberFormatter", "Locale", "Normalizer", "MessageFormatter",
    "IntlDateFormatter", "IntlCalendar", "IntlTimeZone", "IntlException",
    "ResourceBundle", "Transliterator", "Spoofchecker", "IntlChar",
    # Misc extensions
    "mysqli", "mysqli_result", "mysqli_stmt", "mysqli_sql_exception",
    "SQLite3", "SQLite3Stmt", "SQLite3Result", "ZipArchive", "Phar",
    "PharData", "PharFileInfo", "PharException", "SoapClient", "SoapServer",
    "SoapFault", "SoapHeader", "SoapParam", "SoapVar", "SessionHandler",
    "SessionHandlerInterface", "SessionIdInterface", "CURLFile",
    "CURLStringFile", "finfo", "GMP",
})


def is_builtin(name: str) -> bool:
    """Whether `name` is a class PHP provides without an import."""
    return name in BUILTIN_CLASSES
