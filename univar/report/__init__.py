"""
Report package.

Modules
-------
assembler
    Summary → ordered, labelled :class:`~univar.models.report.Report`.
sinks
    File and console destinations for a rendered report.
"""
