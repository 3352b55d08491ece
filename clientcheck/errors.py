class ClientCheckError(RuntimeError):
    pass


class InputFileError(ClientCheckError):
    pass


class InvalidRecordSequenceError(ClientCheckError):
    pass


class ReportWriteError(ClientCheckError):
    pass
