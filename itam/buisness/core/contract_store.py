from itam.buisness.core.field_types import DateField, DecimalField, TextField
from itam.buisness.core.record_store import RecordStore
from itam.data.core.contract_info.contract import Contract


class ContractStore(RecordStore):
    model = Contract
    label = 'Contract'
    fields = (
        TextField('contract_name', required=True),
        TextField('vendor'),
        TextField('contract_type', max_length=50),
        DateField('start_date'),
        DateField('end_date'),
        DecimalField('contract_value', default=0, precision=12),
        TextField('status', default='Active', max_length=50),
        DateField('renewal_date'),
        TextField('contact_person'),
        TextField('contact_email'),
    )
    search_columns = ('contract_name', 'vendor', 'contact_person', 'contact_email')
