"""Effectiveness-NTU heat exchanger quantities, arrangements, streams and solvers."""