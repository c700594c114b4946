"""Thermodynamic states, capabilities, fluids and perfect gas and incompressible models."""