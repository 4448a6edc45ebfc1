# models/device_name.py

from extensions import db

class DeviceName(db.Model):
    __tablename__ = 'devicenames'

    id = db.Column('Device_Name_ID', db.Integer, primary_key=True, autoincrement=True)

    # User-chosen label, 5-16 word characters
    custom_name = db.Column('Custom_Name', db.String(16), nullable=False)

    # Owning DeviceType; deleting it removes this row
    device_type_id = db.Column(
        'Device_Type_ID',
        db.Integer,
        db.ForeignKey('devicetypes.Device_Type_ID', ondelete='CASCADE'),
        nullable=False
    )
    device_type = db.relationship("DeviceType", back_populates="device_name")

    def __repr__(self):
        return f"<DeviceName {self.custom_name} -> {self.device_type_id}>"
