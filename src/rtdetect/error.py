class InvalidInputError(Exception):
    """
    raised when the inputs to the detection step are missing, empty or of the wrong type.
    Always raised before any matching is attempted
    """

    pass


class PartnerNotFoundError(Exception):
    """
    raised when a breakend references a partner which is not part of the input or
    when the partner does not reference the breakend back
    """

    pass


class NotSpecifiedError(Exception):
    """
    raised when information is required for a function but has not been given

    for example if the transcript of an exon row had not been given in the annotation table
    """

    pass
