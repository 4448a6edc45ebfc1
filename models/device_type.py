# models/device_type.py

from extensions import db

class DeviceType(db.Model):
    __tablename__ = 'devicetypes'

    # Primary key
    id = db.Column('Device_Type_ID', db.Integer, primary_key=True, autoincrement=True)

    # Category label, e.g. "Thermostat"
    device_type = db.Column('Device_Type', db.String(50), nullable=False)

    # Optional status fields, NULL when not applicable to the category
    on_off = db.Column('On_Off', db.SmallInteger, nullable=True, comment="0/1 power state")
    temperature = db.Column('Temperature', db.SmallInteger, nullable=True, comment="1-220")
    volume = db.Column('Volume', db.SmallInteger, nullable=True, comment="0-100")
    batteries_included = db.Column('Batteries_Included', db.SmallInteger, nullable=True, comment="0/1")
    open_closed = db.Column('Open_Closed', db.SmallInteger, nullable=True, comment="0/1 open state")

    device_name = db.relationship(
        "DeviceName",
        back_populates="device_type",
        uselist=False,
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<DeviceType {self.id} {self.device_type}>"
