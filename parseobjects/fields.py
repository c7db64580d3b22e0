# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

Fields are class attributes for `DataObject` subclasses that provide coding
between the JSON a Parse server sends and the attributes of your objects.

Parse sends most values as plain JSON, but names its keys in camel case and
wraps some types in ``{"__type": ...}`` dictionaries. Declare a field's
`api_name` to map a key onto a Python attribute name, and use a `Field`
subclass such as `Datetime` or `Date` when the value needs converted.

"""

from datetime import datetime, tzinfo, timedelta

import parseobjects.dataobject
from parseobjects.errors import BadResponse


class Field(object):

    """A property for encoding object attributes as dictionary values and
    decoding dictionary values into object attributes.

    Declare a `Field` instance for each attribute of a `DataObject` that
    should be encoded to or decoded from a dictionary.

    Use a `Field` instance directly for simple `DataObject` attributes that
    can be the same type as their dictionary values. That is, use `Field`
    fields for strings, numbers, and boolean values. If your attribute data
    does need converted, use one of the `Field` subclasses from this module,
    or override the `decode()` and `encode()` methods in a new subclass.

    """

    def __init__(self, api_name=None, default=None):
        """Sets the field's matching deserialization field and default value.

        Optional parameter `api_name` is the key of this field's matching
        value in a dictionary. If not given, the attribute name of the field
        when its class was defined is used.

        Optional parameter `default` is the default value to use for this
        attribute when the dictionary to decode does not contain a value.
        `default` can be a value or callable. A callable `default` is passed
        the object being decoded into.

        """
        self.api_name = api_name
        self.default  = default

    def install(self, attrname, cls):
        self.attrname = attrname
        if self.api_name is None:
            self.api_name = attrname
        self.of_cls = cls

    def __get__(self, obj, cls):
        """Returns the field's value on the given object instance, or the
        field's default value if no value for the field is available.

        Note the field's value will be decoded from API data if necessary,
        raising any exceptions that the field's `decode()` method may raise.

        """
        if obj is None:
            # Yield the real field instance when gotten through the class.
            return self

        if self.attrname not in obj.__dict__:
            try:
                value = obj.api_data[self.api_name]
            except KeyError:
                if callable(self.default):
                    value = self.default(obj)
                else:
                    value = self.default
            else:
                value = self.decode(value)
            # Store the value so we need decode it only once.
            obj.__dict__[self.attrname] = value

        return obj.__dict__[self.attrname]

    def __set__(self, obj, value):
        obj.__dict__[self.attrname] = value

    def __delete__(self, obj):
        # Delete both the instance and API data, so we'll get a real
        # attribute miss next time and return the field's default.
        obj.__dict__.pop(self.attrname, None)
        obj.api_data.pop(self.api_name, None)

    def decode(self, value):
        """Decodes a dictionary value into a `DataObject` attribute value.

        This implementation returns the `value` parameter unchanged.

        """
        return value

    def encode(self, value):
        """Encodes a `DataObject` attribute value into a dictionary value.

        This implementation returns the `value` parameter unchanged.

        """
        return value


class List(Field):

    """A field representing a homogeneous list of data.

    The elements of the list are decoded through another field specified when
    the `List` is declared.

    """

    def __init__(self, fld, **kwargs):
        super(List, self).__init__(**kwargs)
        self.fld = fld

    def install(self, attrname, cls):
        super(List, self).install(attrname, cls)

        # Make sure our content field knows its owner too.
        self.fld.install(attrname, cls)

    def decode(self, value):
        return [self.fld.decode(v) for v in value]

    def encode(self, value):
        return [self.fld.encode(v) for v in value]


class Dict(List):

    """A field representing a homogeneous mapping of data.

    The elements of the mapping are decoded through another field specified
    when the `Dict` is declared.

    """

    def decode(self, value):
        return dict((k, self.fld.decode(v)) for k, v in value.items())

    def encode(self, value):
        return dict((k, self.fld.encode(v)) for k, v in value.items())


class AcceptsStringCls(object):
    """Mixin for fields with a ``cls`` attribute that can either be a
    ``DataObject`` subclass or a string name of a ``DataObject`` subclass (to
    allow forward references)."""

    def get_cls(self):
        cls = self.__dict__['cls']
        if not callable(cls):
            cls = parseobjects.dataobject.find_by_name(cls)
        return cls

    def set_cls(self, cls):
        self.__dict__['cls'] = cls

    cls = property(get_cls, set_cls)


class Object(AcceptsStringCls, Field):

    """A field representing a nested `DataObject`."""

    def __init__(self, cls, **kwargs):
        """Sets the the `DataObject` class the field represents.

        `cls` may also be the name of a class, in which case the referenced
        class is the leafmost `DataObject` subclass declared with that name.

        """
        super(Object, self).__init__(**kwargs)
        self.cls = cls

    def decode(self, value):
        if value is None:
            if callable(self.default):
                return self.default()
            return self.default
        return self.cls.from_dict(value)

    def encode(self, value):
        return value.to_dict()


class UTC(tzinfo):
    """UTC"""
    ZERO = timedelta(0)

    def utcoffset(self, dt):
        return UTC.ZERO

    def tzname(self, dt):
        return "UTC"

    def dst(self, dt):
        return UTC.ZERO


class Datetime(Field):

    """A field representing a timestamp, as Parse sends for the
    ``createdAt`` and ``updatedAt`` keys of every object."""

    dateformat = "%Y-%m-%dT%H:%M:%S.%fZ"
    utc = UTC()

    def __init__(self, dateformat=None, **kwargs):
        super(Datetime, self).__init__(**kwargs)
        if dateformat is not None:
            self.dateformat = dateformat

    def decode(self, value):
        """Decodes a timestamp string into a `datetime` with UTC tzinfo.

        Timestamp strings should be of the format ``YYYY-MM-DDTHH:MM:SS.mmmZ``.
        Anything else came from a server this client can't understand, and
        raises `BadResponse`.

        """
        if value is None:
            if callable(self.default):
                return self.default()
            return self.default
        # Self-hosted servers may drop the milliseconds.
        for dateformat in (self.dateformat, "%Y-%m-%dT%H:%M:%SZ"):
            try:
                return datetime.strptime(value, dateformat).replace(
                    tzinfo=Datetime.utc)
            except (TypeError, ValueError):
                pass
        raise BadResponse('Value to decode %r is not a valid date time stamp' % (value,))

    def encode(self, value):
        """Encodes a `datetime` into a timestamp string with millisecond
        precision. Aware values are converted to UTC first; naive values are
        assumed to be UTC already."""
        if not isinstance(value, datetime):
            raise TypeError('Value to encode %r is not a datetime' % (value,))
        if value.tzinfo is not None:
            value = value.astimezone(Datetime.utc)
        return '%s.%03dZ' % (value.strftime('%Y-%m-%dT%H:%M:%S'),
                             value.microsecond // 1000)


class Date(Datetime):

    """A field representing a Parse ``Date`` value, a timestamp wrapped as
    ``{"__type": "Date", "iso": "..."}``."""

    def decode(self, value):
        if isinstance(value, dict):
            if value.get('__type') != 'Date':
                raise BadResponse('Value to decode %r is not a Date' % (value,))
            value = value.get('iso')
        return super(Date, self).decode(value)

    def encode(self, value):
        return {'__type': 'Date', 'iso': super(Date, self).encode(value)}
