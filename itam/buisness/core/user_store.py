from itam.buisness.core.field_types import IntegerField, TextField
from itam.buisness.core.record_store import RecordStore
from itam.data.core.user_info.user import User


class UserStore(RecordStore):
    model = User
    label = 'User'
    fields = (
        TextField('user_name', required=True),
        TextField('email'),
        TextField('department'),
        TextField('phone', max_length=50),
        TextField('role', max_length=100),
        TextField('status', default='Active', max_length=50),
        IntegerField('assigned_assets', default=0),
    )
    search_columns = ('user_name', 'email', 'department', 'phone')
