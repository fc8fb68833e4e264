from .excel import read_catalog
