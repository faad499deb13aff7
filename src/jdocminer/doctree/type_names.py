"""Well-known ``java.lang`` type names, visible in every compilation unit without an import."""

JAVA_LANG_TYPES = frozenset([
    # Core classes and interfaces
    "Object", "String", "StringBuilder", "StringBuffer", "CharSequence",
    "Boolean", "Byte", "Character", "Short", "Integer", "Long", "Float", "Double",
    "Number", "Void", "Math", "StrictMath", "System", "Thread", "Runnable",
    "Class", "ClassLoader", "Enum", "Record", "Iterable", "Comparable", "Cloneable",
    "AutoCloseable", "Appendable", "Readable", "Process", "Runtime",
    "Override", "Deprecated", "SuppressWarnings", "FunctionalInterface", "SafeVarargs",
    # Throwables
    "Throwable", "Exception", "Error", "RuntimeException",
    "ArithmeticException", "ArrayIndexOutOfBoundsException", "ArrayStoreException",
    "ClassCastException", "ClassNotFoundException", "CloneNotSupportedException",
    "EnumConstantNotPresentException", "IllegalAccessException",
    "IllegalArgumentException", "IllegalCallerException", "IllegalMonitorStateException",
    "IllegalStateException", "IllegalThreadStateException", "IndexOutOfBoundsException",
    "InstantiationException", "InterruptedException", "NegativeArraySizeException",
    "NoSuchFieldException", "NoSuchMethodException", "NullPointerException",
    "NumberFormatException", "ReflectiveOperationException", "SecurityException",
    "StringIndexOutOfBoundsException", "TypeNotPresentException",
    "UnsupportedOperationException",
    "AssertionError", "LinkageError", "OutOfMemoryError", "StackOverflowError",
    "VirtualMachineError", "InternalError", "NoClassDefFoundError", "ExceptionInInitializerError",
])
