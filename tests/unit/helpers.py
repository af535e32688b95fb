# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage,
# (C) 2015-2025 MinIO, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

def generate_error(code, message, request_id, host_id,
                   resource, bucket_name, object_name):
    return '''
    <Error>
      <Code>{0}</Code>
      <Message>{1}</Message>
      <RequestId>{2}</RequestId>
      <HostId>{3}</HostId>
      <Resource>{4}</Resource>
      <BucketName>{5}</BucketName>
      <Key>{6}</Key>
    </Error>
    '''.format(code, message, request_id, host_id,
               resource, bucket_name, object_name)


def generate_list_objects(bucket_name, names, is_truncated=False,
                          next_marker=None, prefixes=()):
    contents = "".join(
        f"<Contents><Key>{name}</Key>"
        f"<LastModified>2024-03-01T10:20:30.000Z</LastModified>"
        f"<ETag>&quot;d41d8cd98f00b204e9800998ecf8427e&quot;</ETag>"
        f"<Size>0</Size><StorageClass>STANDARD</StorageClass></Contents>"
        for name in names
    )
    common_prefixes = "".join(
        f"<CommonPrefixes><Prefix>{prefix}</Prefix></CommonPrefixes>"
        for prefix in prefixes
    )
    marker = f"<NextMarker>{next_marker}</NextMarker>" if next_marker else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<ListBucketResult '
        'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
        f"<Name>{bucket_name}</Name><MaxKeys>1000</MaxKeys>"
        f"<IsTruncated>{'true' if is_truncated else 'false'}</IsTruncated>"
        f"{marker}{contents}{common_prefixes}"
        "</ListBucketResult>"
    ).encode()


def generate_list_uploads(bucket_name, uploads, is_truncated=False,
                          next_key_marker=None, next_upload_id_marker=None):
    entries = "".join(
        f"<Upload><Key>{key}</Key><UploadId>{upload_id}</UploadId>"
        f"<Initiated>{initiated}</Initiated>"
        f"<StorageClass>STANDARD</StorageClass></Upload>"
        for key, upload_id, initiated in uploads
    )
    markers = ""
    if next_key_marker:
        markers += f"<NextKeyMarker>{next_key_marker}</NextKeyMarker>"
    if next_upload_id_marker:
        markers += (
            f"<NextUploadIdMarker>{next_upload_id_marker}"
            "</NextUploadIdMarker>"
        )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<ListMultipartUploadsResult '
        'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
        f"<Bucket>{bucket_name}</Bucket><MaxUploads>1000</MaxUploads>"
        f"<IsTruncated>{'true' if is_truncated else 'false'}</IsTruncated>"
        f"{markers}{entries}"
        "</ListMultipartUploadsResult>"
    ).encode()


def generate_list_parts(bucket_name, object_name, upload_id, parts,
                        is_truncated=False, next_part_number_marker=None):
    entries = "".join(
        f"<Part><PartNumber>{number}</PartNumber>"
        f"<LastModified>2024-03-01T10:20:30.000Z</LastModified>"
        f"<ETag>&quot;{etag}&quot;</ETag><Size>{size}</Size></Part>"
        for number, etag, size in parts
    )
    marker = (
        f"<NextPartNumberMarker>{next_part_number_marker}"
        "</NextPartNumberMarker>"
        if next_part_number_marker else ""
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<ListPartsResult xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
        f"<Bucket>{bucket_name}</Bucket><Key>{object_name}</Key>"
        f"<UploadId>{upload_id}</UploadId><MaxParts>1000</MaxParts>"
        f"<IsTruncated>{'true' if is_truncated else 'false'}</IsTruncated>"
        f"{marker}{entries}"
        "</ListPartsResult>"
    ).encode()
