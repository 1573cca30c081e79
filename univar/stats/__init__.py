"""
Estimator sets.

Modules
-------
numeric
    Mean, median, mode, variance, standard deviation, coefficient of
    variation, interpolated quartiles, IQR outliers, skewness, kurtosis.
categorical
    Mode, frequency table, proportion table.
summary
    Runs the right set for a sample and bundles the results.
"""
