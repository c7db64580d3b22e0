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

`DataObject` is a class of object that provides coding between object
attributes and dictionaries.

In `DataObject` is the mechanism for converting between the JSON a Parse
server sends and typed Python objects. These conversions are performed with
aid of `Field` instances declared on `DataObject` subclasses. `Field` classes
reside in the `parseobjects.fields` module.

This module also provides `populate_value()`, the one step through which
every decoded response is put into a caller's destination.

"""

from copy import deepcopy

import parseobjects.fields
from parseobjects.errors import BadResponse, InvalidArgument


classes_by_name = {}


def find_by_name(name):
    """Finds and returns the DataObject subclass with the given name.

    Parameter `name` should be a bare class name with no module. If there is
    no class by that name, raises `KeyError`.

    """
    return classes_by_name[name]


def get_class_name(value):
    """Returns the remote class name of a `DataObject` instance or class.

    The name is the class's `class_name` attribute when it has one, such as
    ``_User`` for `parseobjects.User` and its subclasses, or the bare Python
    class name otherwise.

    """
    cls = value if isinstance(value, type) else type(value)
    name = getattr(cls, 'class_name', None)
    if name is None:
        name = cls.__name__
    return name


class DataObjectMetaclass(type):
    """Metaclass for `DataObject` classes.

    This metaclass installs all `parseobjects.fields.Field` instances
    declared as attributes of the new class, and makes the new class findable
    through the `dataobject.find_by_name()` function.

    """

    def __new__(cls, name, bases, attrs):
        fields = {}
        new_fields = {}

        # Inherit all the parent DataObject classes' fields.
        for base in bases:
            if isinstance(base, DataObjectMetaclass):
                fields.update(base.fields)

        for attrname, field in attrs.items():
            if isinstance(field, parseobjects.fields.Field):
                new_fields[attrname] = field
            elif attrname in fields:
                # Throw out any parent fields that the subclass defined as
                # something other than a Field.
                del fields[attrname]

        fields.update(new_fields)
        attrs['fields'] = fields
        obj_cls = super(DataObjectMetaclass, cls).__new__(cls, name, bases, attrs)

        for attrname, field in new_fields.items():
            field.install(attrname, obj_cls)

        # Register the new class so Object fields can have forward-referenced it.
        classes_by_name[name] = obj_cls

        return obj_cls


class DataObject(object, metaclass=DataObjectMetaclass):

    """An object that can be decoded from or encoded as a dictionary.

    DataObject subclasses should be declared with their different data
    attributes defined as instances of fields from the `parseobjects.fields`
    module. For example:

    >>> from parseobjects import dataobject, fields
    >>> class Score(dataobject.DataObject):
    ...     player  = fields.Field(api_name='playerName')
    ...     score   = fields.Field()
    ...     updated = fields.Datetime(api_name='updatedAt')
    ...

    Keys of the decoded dictionary that have no matching field are kept in
    the `api_data` attribute and encoded again by `to_dict()`.

    """

    def __init__(self, **kwargs):
        """Initializes a new `DataObject` with the given field values."""
        self.api_data = {}
        self.__dict__.update(kwargs)

    def __eq__(self, other):
        """Returns whether two `DataObject` instances are of the same type and
        contain the same data in all their fields."""
        if type(self) != type(other):
            return False
        for k in self.fields:
            if getattr(self, k) != getattr(other, k):
                return False
        return True

    def __ne__(self, other):
        return not self == other

    __hash__ = object.__hash__

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.to_dict())

    def get(self, attr, *args):
        return getattr(self, attr, *args)

    def __iter__(self):
        for key in self.fields.keys():
            yield key

    def to_dict(self):
        """Encodes the DataObject to a dictionary."""
        data = deepcopy(self.api_data)
        for field_name, field in self.fields.items():
            value = getattr(self, field.attrname, None)
            if value is not None:
                data[field.api_name] = field.encode(value)
        return data

    @classmethod
    def from_dict(cls, data):
        """Decodes a dictionary into a new `DataObject` instance."""
        self = cls()
        self.update_from_dict(data)
        return self

    def update_from_dict(self, data):
        """Replaces the content of this DataObject with a dictionary.

        Parameter `data` is the dictionary from which to update the object.
        Any attribute values already decoded or set locally are discarded, so
        updating twice from the same dictionary leaves the object in the same
        state.

        """
        if not isinstance(data, dict):
            raise TypeError("Cannot update %r from non-dictionary data source %r"
                % (self, data))
        # Clear any local instance field data
        for k in self.fields:
            self.__dict__.pop(k, None)
        self.api_data = data


class Value(object):

    """A destination for a JSON value of any type.

    Strings, numbers, booleans and null have no container to be put into, so
    a cloud function returning one is received into a `Value`:

    >>> greeting = Value()
    >>> client.call_function('hello', {}, greeting)
    >>> greeting.value
    'Hello world!'

    """

    def __init__(self, value=None):
        self.value = value

    def __eq__(self, other):
        return type(self) == type(other) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    __hash__ = object.__hash__

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.value)


def populate_value(dst, data):
    """Puts decoded JSON `data` into the destination `dst` and returns `dst`.

    `dst` must be an instance (not `None`, not a class) of a `DataObject`,
    ``dict``, ``list`` or `Value`. A `DataObject` is updated through its
    fields with `DataObject.update_from_dict()`; a ``dict`` or ``list`` has
    its contents replaced; a `Value` takes `data` as its ``value`` whatever
    its type. Any other destination raises `InvalidArgument`.

    The destination gets its own copy of `data`, so destinations populated
    from the same data never share state with it or with each other.

    If `data` is not the shape the destination needs (a list for a
    `DataObject`, say), `BadResponse` is raised and `dst` is left as it was.

    """
    check_destination(dst)

    if isinstance(dst, Value):
        dst.value = deepcopy(data)
    elif isinstance(dst, DataObject):
        if not isinstance(data, dict):
            raise BadResponse('Cannot populate %s from %r'
                % (type(dst).__name__, data))
        dst.update_from_dict(deepcopy(data))
    elif isinstance(dst, dict):
        if not isinstance(data, dict):
            raise BadResponse('Cannot populate a dict from %r' % (data,))
        dst.clear()
        dst.update(deepcopy(data))
    elif isinstance(dst, list):
        if not isinstance(data, list):
            raise BadResponse('Cannot populate a list from %r' % (data,))
        dst[:] = deepcopy(data)

    return dst


def check_destination(dst):
    """Raises `InvalidArgument` if `populate_value()` could never fill `dst`."""
    # Classes and None fall through here too.
    if not isinstance(dst, (DataObject, dict, list, Value)):
        raise InvalidArgument('destination must be a DataObject, dict, list or Value instance, not %r'
            % (dst,))
