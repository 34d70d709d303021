from .records import create_records_blueprint

bp = create_records_blueprint('contracts', 'Contract', 'contract')
